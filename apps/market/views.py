import logging

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .symbols import search_symbols as find_symbols

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def search_symbols(request):
    """
    GET /api/market/search-symbols?q=TATA
    """
    query = request.query_params.get("q", "")
    results = find_symbols(query)
    logger.debug(f"Symbol search {query!r}: {len(results)} hits")
    return Response(results)
