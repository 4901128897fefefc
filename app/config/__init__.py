# =============================================================================
# Django Project Configuration Package
# =============================================================================
# Settings, root URL configuration and the WSGI entry point for the OMEGA
# billing backend.
# =============================================================================
