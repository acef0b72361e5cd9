"""
Users API Testing Suite

In-process tests for the /users routes, the users service, the user models
and the database bootstrap. The MongoDB collection is replaced by the
in-memory double in ``infrastructure.py``.
"""
