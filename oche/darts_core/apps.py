from django.apps import AppConfig

from oche.darts_core.service import MatchService


class DartsCoreConfig(AppConfig):
    """Lets a Django project list the rules engine in INSTALLED_APPS.

    The engine has no models. Once the app registry is ready, running matches
    live in ``match_service``, shared by every view of the host project.
    """

    name = 'oche.darts_core'
    label = 'darts_core'
    verbose_name = 'Darts Rules Engine'

    match_service = None

    def ready(self):
        self.match_service = MatchService()
