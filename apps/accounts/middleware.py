from django.utils.functional import SimpleLazyObject

from .identity import request_identity


class IdentityMiddleware:
    """
    request.identity 를 지연 평가로 붙여줌
    (AuthenticationMiddleware 의 request.user 와 같은 방식)

    익명 사용자는 None 을 감싸므로 뷰에서는 request_identity() 나
    admin_required / member_required 데코레이터를 사용합니다.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.identity = SimpleLazyObject(lambda: request_identity(request))
        return self.get_response(request)
