# ===== apps/users/ownership.py =====
"""
Per-user record handling shared by the journal endpoints.

Every journal row carries a ``user`` FK and every query here is filtered on
``request.user``. A write or delete aimed at a row the caller does not own
touches nothing and reports ``affected: 0``.
"""
import logging

from django.db import transaction, IntegrityError
from rest_framework import serializers, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class OwnedRecordSerializer(serializers.ModelSerializer):
    """
    Upserts replace the record entirely: writable fields missing from the
    payload fall back to their model default instead of keeping old values.
    """

    def update(self, instance, validated_data):
        for field in instance._meta.concrete_fields:
            if field.primary_key or not field.editable or field.name == 'user':
                continue
            if field.name in validated_data or not self._is_writable_source(field.name):
                continue
            validated_data[field.name] = field.get_default()
        return super().update(instance, validated_data)

    def _is_writable_source(self, name):
        for field in self.fields.values():
            if not field.read_only and field.source == name:
                return True
        return False


def parse_record_id(data):
    raw = data.get('id') if hasattr(data, 'get') else None
    if raw is None or raw == '':
        return None
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise serializers.ValidationError({'id': 'A valid integer is required.'})
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise serializers.ValidationError({'id': 'A valid integer is required.'})


def list_owned(request, model, serializer_class):
    rows = model.objects.filter(user=request.user).order_by('-created_at', '-id')
    return Response(serializer_class(rows, many=True, context={'request': request}).data)


def upsert_owned(request, model, serializer_class):
    """Create when no id is given, replace when the id is the caller's, else no-op."""
    record_id = parse_record_id(request.data)
    instance = None

    if record_id is not None:
        instance = model.objects.filter(id=record_id, user=request.user).first()
        if instance is None:
            logger.info(
                f"Ignored {model.__name__} upsert for id={record_id}: not owned by {request.user.pk}"
            )
            return Response({'success': True, 'affected': 0})

    serializer = serializer_class(instance, data=request.data, context={'request': request})
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        with transaction.atomic():
            obj = serializer.save(user=request.user)
    except IntegrityError as e:
        logger.exception(f"{model.__name__} upsert failed")
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    if instance is None:
        logger.info(f"Created {model.__name__} id={obj.pk} for {request.user.pk}")
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    logger.info(f"Replaced {model.__name__} id={obj.pk} for {request.user.pk}")
    return Response(serializer.data)


def delete_owned(request, model):
    try:
        record_id = parse_record_id(request.data)
    except serializers.ValidationError:
        record_id = None
    if record_id is None:
        return Response({'error': 'id required'}, status=status.HTTP_400_BAD_REQUEST)

    _, per_model = model.objects.filter(id=record_id, user=request.user).delete()
    affected = per_model.get(model._meta.label, 0)

    if affected:
        logger.info(f"Deleted {model.__name__} id={record_id} for {request.user.pk}")
    return Response({'success': True, 'affected': affected})
