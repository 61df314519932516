from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from winners.models import Winner


class WinnerSerializer(serializers.ModelSerializer):
    id = serializers.CharField(
        source="external_id",
        max_length=64,
        validators=[UniqueValidator(queryset=Winner.objects.all())],
    )
    prizeAmount = serializers.CharField(source="prize_amount", max_length=64)
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    # status stays free text, matching imported rows
    status = serializers.CharField(max_length=64, required=False)

    class Meta:
        model = Winner
        fields = [
            "pk",
            "id",
            "phone",
            "name",
            "address",
            "paid",
            "product",
            "prizeAmount",
            "date",
            "status",
            "wcode",
            "image",
            "isActive",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["pk"]
