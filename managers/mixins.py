"""
Logging Hooks

LoggingHooksMixin overrides every lifecycle hook of AbstractObjectManager to
write the outcome to the manager's logger: INFO for successes, WARNING for
errors. Put it before the manager base in the MRO:

    class ArticleManager(LoggingHooksMixin, AbstractObjectManager[Article]):
        entity_class = Article

Overrides that also need their own behaviour should call super() so the
log line is still written.
"""

import logging


class LoggingHooksMixin:
    """Log every lifecycle outcome through ``self.logger``."""

    logger: logging.Logger

    def _describe(self, obj) -> str:
        identifier = getattr(obj, getattr(self, "identifier_attribute", "id"), None)
        return f"{type(obj).__name__}(id={identifier!r})"

    def on_create_success(self, obj, options):
        self.logger.info(f"Created {self._describe(obj)}")
        super().on_create_success(obj, options)

    def on_create_error(self, obj, error_message, options):
        self.logger.warning(f"Could not create {self._describe(obj)}: {error_message}")
        super().on_create_error(obj, error_message, options)

    def on_update_success(self, obj, options):
        self.logger.info(f"Updated {self._describe(obj)}")
        super().on_update_success(obj, options)

    def on_update_error(self, obj, error_message, options):
        self.logger.warning(f"Could not update {self._describe(obj)}: {error_message}")
        super().on_update_error(obj, error_message, options)

    def on_delete_success(self, obj, options):
        self.logger.info(f"Deleted {self._describe(obj)}")
        super().on_delete_success(obj, options)

    def on_delete_error(self, obj, error_message, options):
        self.logger.warning(f"Could not delete {self._describe(obj)}: {error_message}")
        super().on_delete_error(obj, error_message, options)

    def on_activate_success(self, obj, options):
        self.logger.info(f"Activated {self._describe(obj)}")
        super().on_activate_success(obj, options)

    def on_activate_error(self, obj, error_message, options):
        self.logger.warning(f"Could not activate {self._describe(obj)}: {error_message}")
        super().on_activate_error(obj, error_message, options)

    def on_deactivate_success(self, obj, options):
        self.logger.info(f"Deactivated {self._describe(obj)}")
        super().on_deactivate_success(obj, options)

    def on_deactivate_error(self, obj, error_message, options):
        self.logger.warning(f"Could not deactivate {self._describe(obj)}: {error_message}")
        super().on_deactivate_error(obj, error_message, options)

    def on_duplicate_success(self, obj, clone, options):
        self.logger.info(f"Duplicated {self._describe(obj)} as {self._describe(clone)}")
        super().on_duplicate_success(obj, clone, options)

    def on_duplicate_error(self, obj, error_message, options):
        self.logger.warning(f"Could not duplicate {self._describe(obj)}: {error_message}")
        super().on_duplicate_error(obj, error_message, options)
