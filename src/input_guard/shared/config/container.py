from input_guard.application import (
    SanitizeInputUseCase,
    UserInputRules,
    ValidateStructureUseCase,
    ValidateTypeUseCase,
    ValidateUserInputUseCase,
)
from input_guard.shared.config.settings import Settings, settings
from input_guard.shared.logging import ValidationAuditLogger


class ApplicationContainer:
    """Dependency container building use cases from configured limits."""

    def __init__(
        self,
        app_settings: Settings = settings,
        audit_logger: ValidationAuditLogger | None = None,
    ) -> None:
        self.settings = app_settings
        self._audit_logger = audit_logger or ValidationAuditLogger()

    def create_user_input_rules(self) -> UserInputRules:
        """Create validator bounds from settings."""
        return UserInputRules(
            email_min_length=self.settings.email_min_length,
            email_max_length=self.settings.email_max_length,
            username_min_length=self.settings.username_min_length,
            username_max_length=self.settings.username_max_length,
            password_min_length=self.settings.password_min_length,
            password_max_length=self.settings.password_max_length,
            url_max_length=self.settings.url_max_length,
            url_allowed_domains=tuple(self.settings.url_allowed_domains_list),
        )

    def create_validate_structure_use_case(self) -> ValidateStructureUseCase:
        return ValidateStructureUseCase(
            audit_logger=self._audit_logger,
            non_empty_max_depth=self.settings.non_empty_max_depth,
        )

    def create_validate_type_use_case(self) -> ValidateTypeUseCase:
        return ValidateTypeUseCase(audit_logger=self._audit_logger)

    def create_validate_user_input_use_case(self) -> ValidateUserInputUseCase:
        return ValidateUserInputUseCase(
            rules=self.create_user_input_rules(),
            audit_logger=self._audit_logger,
        )

    def create_sanitize_input_use_case(self) -> SanitizeInputUseCase:
        return SanitizeInputUseCase(
            max_input_length=self.settings.max_input_length,
            audit_logger=self._audit_logger,
        )
