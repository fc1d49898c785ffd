from app.routing.gateway_selector import DEFAULT_GATEWAY, GatewayRegistry, resolve_gateway

__all__ = ["DEFAULT_GATEWAY", "GatewayRegistry", "resolve_gateway"]
