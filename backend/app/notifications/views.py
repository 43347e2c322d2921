from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from app.common.responses import ok
from .services import send_push_to_user


class PushNotificationView(APIView):
    permission_classes = [IsAuthenticated]

    # POST /api/notifications/push?title=...&contents=...
    def post(self, request):
        title = request.query_params.get("title") or request.data.get("title") or "test"
        contents = (
            request.query_params.get("contents")
            or request.data.get("contents")
            or "test contents"
        )

        send_push_to_user(request.user.id, str(title), str(contents))
        return ok(None)
