"""
WebSocket Package

Real-time game events over Socket.IO.
"""

from .handlers import register_websocket_handlers, register_state_broadcaster, broadcast_game_state_update

__all__ = ['register_websocket_handlers', 'register_state_broadcaster', 'broadcast_game_state_update']
