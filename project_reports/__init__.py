# Project Reports Portal - Report Listings and Contact Form Backend
# =================================================================
# Layered the same way throughout:
#
# - Presentation:   web/ (FastAPI routes, static files)
# - Domain:         domain/ (data types and error taxonomy, no I/O)
# - Infrastructure: infrastructure/ (filesystem catalog, Excel store, config)
#
# The Excel workbook can be swapped for a database by replacing
# infrastructure/persistence without touching the routes.
