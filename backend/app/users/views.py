import logging

from django.db import DatabaseError
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from app.common.exceptions import Unexpected
from app.common.responses import ok
from app.common.validation import validate_or_reject
from .serializers import DeviceTokenSerializer, UserMeSerializer

logger = logging.getLogger(__name__)


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserMeSerializer(request.user)
        return ok(serializer.data)


class DeviceTokenView(APIView):
    permission_classes = [IsAuthenticated]

    # PATCH /api/users/me/device-token
    # body: { "deviceToken": "..." }
    def patch(self, request):
        data = validate_or_reject(DeviceTokenSerializer(data=request.data))

        user = request.user
        user.device_token = data["deviceToken"]
        try:
            user.save(update_fields=["device_token"])
        except DatabaseError as e:
            raise Unexpected(e)

        logger.info("device token updated user=%s", user.id)
        return ok({"hasDeviceToken": True})
