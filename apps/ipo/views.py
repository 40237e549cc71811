# ===== apps/ipo/views.py =====

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated

from apps.users.ownership import list_owned, upsert_owned, delete_owned
from .models import IpoAccount, IpoRecord
from .serializers import IpoAccountSerializer, IpoRecordSerializer


@api_view(["GET", "POST", "DELETE"])
@permission_classes([IsAuthenticated])
def ipo_accounts(request):
    if request.method == "GET":
        return list_owned(request, IpoAccount, IpoAccountSerializer)

    if request.method == "POST":
        return upsert_owned(request, IpoAccount, IpoAccountSerializer)

    return delete_owned(request, IpoAccount)


@api_view(["GET", "POST", "DELETE"])
@permission_classes([IsAuthenticated])
def ipo_records(request):
    if request.method == "GET":
        return list_owned(request, IpoRecord, IpoRecordSerializer)

    if request.method == "POST":
        return upsert_owned(request, IpoRecord, IpoRecordSerializer)

    return delete_owned(request, IpoRecord)
