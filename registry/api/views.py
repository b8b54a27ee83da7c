from rest_framework.views import APIView
from rest_framework.response import Response
from registry.services.citizen_service import CitizenService


def envelope_response(result: dict) -> Response:
    """Build the {ok, message?, data?, count?, key?} envelope from a service result."""
    body = {"ok": result["success"]}
    for field in ("message", "count", "data", "key"):
        if field in result:
            body[field] = result[field]
    return Response(body, status=result["status"])


class CitizenListCreateView(APIView):
    """
    API endpoint to list and create citizens.

    GET /api/citizens/?name=kamal&nic=200012345678&email=a@b.com

    POST /api/citizens/

    Request body (either naming convention):
    {
        "NDI_ID": "200012345678",
        "FirstName": "Jane",
        "LastName": "Doe",
        "DoB": "20-11-2000",
        "Email": "jane@example.com",
        "Phone": "0771234567",
        "Occupation": "Software Engineer, SCU",
        "Nationality": "Sri Lankan",
        "Blood_Group": "O+"
    }
    """

    def get(self, request):
        """List citizens, most recent first."""
        params = request.query_params
        service = CitizenService()
        result = service.list_citizens(
            name=params.get("name"),
            national_id=params.get("nic") or params.get("nationalId") or params.get("NDI_ID"),
            email=params.get("email"),
        )
        return envelope_response(result)

    def post(self, request):
        """Create a new citizen."""
        service = CitizenService()
        result = service.create_citizen(request.data)
        return envelope_response(result)


class CitizenFindOneView(APIView):
    """
    API endpoint to look up a single citizen from a search body.

    POST /api/citizens/findOne/

    Request body, one of:
        {"id": "42"}                -> storage id
        {"nic": "200012345678"}     -> national ID (also "NDI_ID" or "nationalId")
        {"email": "a@b.com"}        -> email
    """

    def post(self, request):
        service = CitizenService()
        result = service.find_citizen(request.data)
        return envelope_response(result)


class CitizenDetailView(APIView):
    """
    API endpoint for a single citizen addressed by national ID.

    GET    /api/citizens/{national_id}/
    PUT    /api/citizens/{national_id}/   (partial update, omitted fields unchanged)
    PATCH  /api/citizens/{national_id}/
    DELETE /api/citizens/{national_id}/
    """

    def get(self, request, national_id):
        service = CitizenService()
        return envelope_response(service.get_citizen(national_id))

    def put(self, request, national_id):
        """Update the supplied fields of a citizen."""
        service = CitizenService()
        return envelope_response(service.update_citizen(national_id, request.data))

    def patch(self, request, national_id):
        return self.put(request, national_id)

    def delete(self, request, national_id):
        service = CitizenService()
        return envelope_response(service.delete_citizen(national_id))


class CitizenByIdView(APIView):
    """
    API endpoint for a single citizen addressed by storage id.

    GET    /api/citizens/id/{record_id}/
    DELETE /api/citizens/id/{record_id}/

    Responds 400 when the id is not a positive integer.
    """

    def get(self, request, record_id):
        service = CitizenService()
        return envelope_response(service.get_citizen_by_id(record_id))

    def delete(self, request, record_id):
        service = CitizenService()
        return envelope_response(service.delete_citizen_by_id(record_id))
