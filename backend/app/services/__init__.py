"""Services Layer — user, class and program management over a DocumentStore.

Invariants:
    - One management class per collection, constructed per request
    - Services raise TLAError subclasses; routes never build error responses
"""
