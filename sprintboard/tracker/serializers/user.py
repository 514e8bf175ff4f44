# ============================================
# tracker/serializers/user.py
# ============================================
from rest_framework import serializers
from tracker.models import User


class UserOutputSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'external_id', 'name', 'email', 'image_url']


class OrganizationOutputSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    slug = serializers.CharField()
    image_url = serializers.CharField(required=False, allow_blank=True)
