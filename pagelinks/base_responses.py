from django.http.response import JsonResponse

invalid_pagination_response = lambda message: JsonResponse(
    {'message': message},
    status=400
)

missing_items_response = JsonResponse(
    {'message': 'The view has not items for paginate'},
    status=500
)

__all__= [
    'invalid_pagination_response',
    'missing_items_response',
]
