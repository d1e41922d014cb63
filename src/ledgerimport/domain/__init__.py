"""Domain layer for ledgerimport application.

Services are imported from their modules directly; this package stays free
of imports so the database layer can load ``domain.entities`` without a
cycle.
"""
