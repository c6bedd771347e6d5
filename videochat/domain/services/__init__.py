from .chat_history import reduce_chat_history

__all__ = ["reduce_chat_history"]
