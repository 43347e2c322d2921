from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from app.common.responses import ok
from .services import get_subscribe_state, serialize_window, subscribe


class SubscriptionView(APIView):
    permission_classes = [IsAuthenticated]

    # GET /api/subscriptions
    def get(self, request):
        return ok(get_subscribe_state(request.user))

    # POST /api/subscriptions
    def post(self, request):
        window = subscribe(request.user)
        return ok(serialize_window(window))
