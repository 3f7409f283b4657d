"""
JSON endpoints.

POST /api/contact/submit/ runs the same controller and submission adapter as
the contact page, for clients that submit the form with a script.
"""
from collections.abc import Mapping

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.views import APIView

from contact.controller import CacheSubmissionGuard, ContactFormController
from contact.notifications import ListNotifier
from contact.submission import FAILURE_FALLBACK, ContactSubmissionAdapter


@api_view(['GET'])
@permission_classes([AllowAny])
def api_root(request, format=None):
    return Response({
        'contact-submit': reverse('contact-submit', request=request, format=format),
    })


class ContactSubmitAPIView(APIView):
    """
    Public endpoint for contact form submissions.

    200 when the message was handed over, 400 on validation errors, 409 while
    another submission from the same session is in flight, 502 when the
    handler failed.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        notifier = ListNotifier()
        controller = ContactFormController(
            ContactSubmissionAdapter(notifier),
            guard=CacheSubmissionGuard.for_request(request),
        )

        if controller.is_submitting:
            return self._busy()

        if not isinstance(request.data, Mapping):
            return Response(
                {
                    'success': False,
                    'error': 'Validation failed',
                    'fields': {},
                    'notifications': [],
                },
                status=status.HTTP_400_BAD_REQUEST
            )

        controller.load(request.data)
        result = controller.submit()

        if result is None:
            if controller.errors:
                return Response(
                    {
                        'success': False,
                        'error': 'Validation failed',
                        'fields': controller.errors,
                        'notifications': notifier.as_list(),
                    },
                    status=status.HTTP_400_BAD_REQUEST
                )
            return self._busy()

        if result.success:
            return Response(
                {
                    'success': True,
                    'error': None,
                    'notifications': notifier.as_list(),
                },
                status=status.HTTP_200_OK
            )

        return Response(
            {
                'success': False,
                'error': result.error or FAILURE_FALLBACK,
                'notifications': notifier.as_list(),
            },
            status=status.HTTP_502_BAD_GATEWAY
        )

    def _busy(self):
        return Response(
            {
                'success': False,
                'error': 'A message is already being sent. Please wait.',
            },
            status=status.HTTP_409_CONFLICT
        )
