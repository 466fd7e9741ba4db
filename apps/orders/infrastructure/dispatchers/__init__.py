from .whatsapp_dispatcher import WhatsAppDispatcher

__all__ = ['WhatsAppDispatcher']
