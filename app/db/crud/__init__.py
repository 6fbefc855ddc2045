from . import product, store, user

__all__ = ['product', 'store', 'user']
