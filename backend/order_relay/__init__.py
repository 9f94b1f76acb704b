"""
Order relay: stores per-client upstream credentials, signs and forwards
order grab requests, and shares a WebSocket token between clients.
"""
