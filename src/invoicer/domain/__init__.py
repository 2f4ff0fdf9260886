"""Domain layer for invoicer application.

Services are imported from their modules (e.g. ``invoicer.domain.invoice``)
so that the storage layer can import entities without a cycle.
"""
