# Services package.
#
# Each module exposes async functions holding the business rules for one
# collection, on top of the generic functions in ``app.repository``:
#
#   user_service     - CRUD for User, plus the user's posts
#   post_service     - CRUD + title search for Post, author snapshots
#   comment_service  - append-only comments embedded in a Post
#   seed_service     - sample data
#
# Lookups raise ``ObjectNotFoundError`` for unknown ids.  All functions take
# an AsyncSession as their first argument so that the router layer controls
# the transaction boundary via the ``get_db`` dependency.
