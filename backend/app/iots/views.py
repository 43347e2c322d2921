from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from app.common.responses import ok
from app.common.validation import validate_or_reject
from .serializers import IotBindSerializer, IotSerializer
from .services import bind_device, list_devices


class IotView(APIView):
    permission_classes = [IsAuthenticated]

    # GET /api/iots
    def get(self, request):
        return ok({"iots": IotSerializer(list_devices(request.user), many=True).data})

    # POST /api/iots
    # body: { "iot": "IOT-0001", "name": "주방" }
    def post(self, request):
        data = validate_or_reject(IotBindSerializer(data=request.data))
        iot = bind_device(request.user, data["iot"], data["name"])
        return ok(IotSerializer(iot).data)
