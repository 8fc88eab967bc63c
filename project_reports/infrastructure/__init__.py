# Infrastructure Layer
# ====================
# Everything that touches the outside world:
# - reports/: PDF report catalog over the public directory tree
# - persistence/: Excel-backed contact store
# - config/: Environment and settings management
