"""
Service layer modules.

These modules encapsulate the relay's behaviour:
- Per-client upstream credentials (config_store)
- The shared WebSocket token (ws_token)
- Request signing for the order endpoint (signing)
- Forwarding order grabs upstream (grab_order_client)
"""
