from .audit_hooks import log_integration_call
from .progress_hooks import FUN_ACTIVITIES, get_progress_message, pick_fun_activity

__all__ = ["log_integration_call", "FUN_ACTIVITIES", "get_progress_message", "pick_fun_activity"]
