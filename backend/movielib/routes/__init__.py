# Routes package init
"""
Movies Library Backend — API Routes Package
=============================================

What:  HTTP route handlers, one APIRouter per resource.

Route Inventory:
    - health.py:  GET    /health-check
    - about.py:   GET    /about, /abcd, /acd
    - movies.py:  GET    /movies
                  GET    /movies/genres/{name}
                  POST   /movies/{title}
                  PUT    /movies/{title}
                  DELETE /movies/{id}
    - genres.py:  GET    /genres
                  POST   /genres/{name}
                  PUT    /genres/{name}
                  DELETE /genres/{id}

Routes stay thin: read the path parameter, call the service, return its
result. Errors are raised as application exceptions and rendered by the
handlers registered in main.py.
"""
