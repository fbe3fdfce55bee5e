class LandingError(Exception):
    """Base class for landing page engine errors."""


class InvariantViolation(LandingError):
    pass


class InvalidColorFormat(LandingError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class UnknownSectionType(LandingError):
    def __init__(self, section_type, section_id=None):
        self.section_type = section_type
        self.section_id = section_id
        message = f"Unknown section type: {section_type!r}"
        if section_id is not None:
            message += f" (section {section_id!r})"
        super().__init__(message)


class SectionNotFound(LandingError, LookupError):
    def __init__(self, section_id):
        self.section_id = section_id
        super().__init__(f"Section not found: {section_id!r}")


class TemplateNotFound(LandingError, LookupError):
    def __init__(self, template_id):
        self.template_id = template_id
        super().__init__(f"Template not found: {template_id!r}")
