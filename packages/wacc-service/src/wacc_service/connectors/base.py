from abc import ABC, abstractmethod
from typing import Any, Dict, Type


class BaseConnector(ABC):
    """Abstract base class for market data connectors."""

    @abstractmethod
    def get_market_data(self, ticker: str) -> Dict[str, Any]:
        """Fetch market data (Beta, Market Cap, Total Debt, Risk Free Rate, etc.)."""
        pass

    @abstractmethod
    def get_wacc_inputs(self, ticker: str) -> Dict[str, Any]:
        """
        Fetch and normalize data specifically for the WACC Engine.
        Returns a dictionary containing keys like:
        - equity_value (market cap, base currency units)
        - debt_value (MRQ total debt)
        - risk_free_rate, beta, market_risk_premium (CAPM)
        - tax_rate (marginal, by country)
        """
        pass


class ConnectorFactory:
    """Simple factory to manage data connectors (Singleton Pattern)."""

    _connector_classes: Dict[str, Type[BaseConnector]] = {}
    _instances: Dict[str, BaseConnector] = {}

    @classmethod
    def register(cls, name: str, connector_cls: Type[BaseConnector]) -> None:
        cls._connector_classes[name] = connector_cls

    @classmethod
    def get_connector(cls, name: str) -> BaseConnector:
        # Check cache first
        if name in cls._instances:
            return cls._instances[name]

        # Create new instance if registered
        connector_cls = cls._connector_classes.get(name)
        if not connector_cls:
            raise ValueError(f"Connector '{name}' not found.")

        instance = connector_cls()
        cls._instances[name] = instance
        return instance
