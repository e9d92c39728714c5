from wacc_service.connectors.base import BaseConnector, ConnectorFactory
from wacc_service.connectors.yahoo import YahooFinanceConnector

__all__ = ["BaseConnector", "ConnectorFactory", "YahooFinanceConnector"]
