from infrastructure.storage.supabase_storage import SupabaseImageStorage

__all__ = [
    "SupabaseImageStorage",
]
