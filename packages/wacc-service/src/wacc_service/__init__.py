"""
WACC Service
============

FastAPI backend and HTTP client around ``wacc_engine``.

- ``wacc_service.app`` — ``create_app()`` / ``app`` (``POST /api/wacc``)
- ``wacc_service.client`` — ``WaccClient`` for a remote WACC backend
- ``wacc_service.connectors`` — market data for CAPM prefill
"""
