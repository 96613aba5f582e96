from .query import query, query_bindable
