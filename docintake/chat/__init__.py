from docintake.chat.assistant import ChatAssistant
from docintake.chat.client_base import BaseChatClient
from docintake.chat.factory import ChatClientFactory

__all__ = ["BaseChatClient", "ChatAssistant", "ChatClientFactory"]
