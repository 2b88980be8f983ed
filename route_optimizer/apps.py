from django.apps import AppConfig


class RouteOptimizerConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'route_optimizer'
    verbose_name = 'Locations and Routing'

    def ready(self):
        """
        Connect the handlers that drop the cached location graph on changes.
        """
        from route_optimizer import signals  # noqa: F401
