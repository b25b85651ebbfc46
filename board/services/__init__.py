# Services package.
#
#   post_service — create / read / update / delete / paginated list for Post
#
# Service functions take an AbstractUnitOfWork as their first argument and
# open exactly one transaction scope per call, so the transaction boundary
# is the operation itself rather than the HTTP request.
