from invoice_dashboard.llm.client_base import Attachment, BaseModelClient
from invoice_dashboard.llm.factory import ModelClientFactory

__all__ = ["Attachment", "BaseModelClient", "ModelClientFactory"]
