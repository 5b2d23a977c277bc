"""
Service layer abstraction.

Services encapsulate the lookup logic so that API handlers only deal
with routing and serialisation.
"""
