"""
The `person` resource: schemas, SQL repository, handlers, and HTTP routes.
"""
