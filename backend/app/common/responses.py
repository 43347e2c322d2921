from rest_framework.response import Response


def ok(data=None, http_status: int = 200):
    return Response({"success": True, "data": data, "error": None}, status=http_status)
