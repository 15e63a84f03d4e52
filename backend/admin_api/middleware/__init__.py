# Middleware package init
"""
DA Admin Backend — Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Access Log] → [Security Headers] → [CORS gate]
            → [Error boundary] → [GZip] → Router

    1. Request ID first so every later layer can log and return it
    2. Access log sees the final status, including CORS rejections
    3. Security headers land on every response, including rejections
    4. CORS gate answers preflight and rejects before routing
    5. Error boundary turns route faults into 500s that pass back out
       through every layer above
"""
