# Services package init
"""
DA Admin Backend — Services Layer
===================================

What:  Mock business logic sitting behind the routes.

Service Inventory:
    - UserService:  fixed user list, id echo, create with time-derived id
    - AuthService:  presence-checked placeholder login and registration
    - StatsService: fixed dashboard and analytics figures

No service touches the database or any shared mutable state.
"""
