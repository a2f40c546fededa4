"""Domain layer for meal plans.

Business rules for projecting meal plans into calendar views, decoupled
from the HTTP/GraphQL delivery layers and from storage.
"""
