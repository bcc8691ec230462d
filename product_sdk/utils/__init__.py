"""
Utility modules for the product catalog client
"""
from .config_loader import ProductApiConfig, load_client_config

__all__ = [
    'ProductApiConfig',
    'load_client_config',
]
