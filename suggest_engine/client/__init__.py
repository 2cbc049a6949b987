from suggest_engine.client.invoker import (
    BuildRequestDraft,
    InvokerState,
    Notification,
    SuggestionInvoker,
)

__all__ = ["BuildRequestDraft", "InvokerState", "Notification", "SuggestionInvoker"]
