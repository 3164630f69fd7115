# Services package init
"""
Movies Library Backend — Services Layer
=========================================

What:  Store operations sitting between routes (HTTP) and MongoDB.
How:   Services receive the database handle per call and return response
       models; failures surface as application exceptions.

Service Inventory:
    - MovieService: list, filter by genre, create, update by title, delete by id
    - GenreService: list, create, update by name, delete by id
"""
