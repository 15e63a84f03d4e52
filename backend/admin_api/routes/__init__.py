# Routes package init
"""
DA Admin Backend — API Routes Package
=======================================

Route Inventory:
    - system.py:  GET /, GET /api/health, GET /api/test
    - users.py:   GET/POST /api/users, GET /api/users/{user_id}
    - auth.py:    POST /api/auth/login, POST /api/auth/register
    - data.py:    GET /api/data/dashboard, GET /api/data/analytics
    - table.py:   the static route table and the router built from it

Routes stay thin: pull data from the request, call a service, return a
response model.
"""
