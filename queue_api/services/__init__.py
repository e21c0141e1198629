from .chart_service import load_queue_listing, load_server_series

__all__ = ["load_queue_listing", "load_server_series"]
