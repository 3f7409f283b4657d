from django.http import HttpResponseRedirect
from django.urls import reverse_lazy
from django.views.generic import FormView

from contact import catalog
from contact.controller import CacheSubmissionGuard, ContactFormController
from contact.forms import ContactForm
from contact.links import direct_contact_links
from contact.notifications import DESTRUCTIVE, MessagesNotifier, Notification
from contact.submission import ContactSubmissionAdapter

BUSY_TITLE = 'Please wait'
BUSY_DESCRIPTION = 'Your message is already being sent.'


class ContactView(FormView):
    template_name = 'contact/contact.html'
    form_class = ContactForm
    success_url = reverse_lazy('contact:contact')

    def get_controller(self):
        """The view marks the controller mounted once it has the request context."""
        if not hasattr(self, 'controller'):
            adapter = ContactSubmissionAdapter(MessagesNotifier(self.request))
            self.controller = ContactFormController(
                adapter,
                guard=CacheSubmissionGuard.for_request(self.request),
            )
            self.controller.mount()
        return self.controller

    def get_initial(self):
        initial = super().get_initial()
        service = self.request.GET.get('service')
        if service:
            if catalog.is_subject(service):
                initial['subject'] = service
            else:
                initial['message'] = f"I would like to request a {service.lower()}."
        return initial

    def get_form_kwargs(self):
        controller = self.get_controller()
        kwargs = super().get_form_kwargs()
        kwargs['submitting'] = controller.is_submitting
        if self.request.method in ('POST', 'PUT'):
            kwargs['data'] = controller.as_initial()
        return kwargs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['contact'] = self.get_controller()
        context['direct_links'] = direct_contact_links()
        return context

    def post(self, request, *args, **kwargs):
        controller = self.get_controller()
        if controller.is_submitting:
            # Inputs are locked; show the visitor what they sent without re-validating it
            self._notify_busy()
            form = self.form_class(initial=request.POST.dict(), submitting=True)
            return self.render_to_response(self.get_context_data(form=form))

        controller.load(request.POST)
        result = controller.submit()

        if result is not None and result.success:
            return HttpResponseRedirect(self.get_success_url())
        if result is None and not controller.errors:
            self._notify_busy()
        return self.render_to_response(self.get_context_data())

    def _notify_busy(self):
        self.get_controller().adapter.notifier.notify(
            Notification(BUSY_TITLE, BUSY_DESCRIPTION, DESTRUCTIVE)
        )
