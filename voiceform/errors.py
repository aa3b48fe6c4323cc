class WizardError(Exception):
    """Base for errors the API reports to the caller as-is."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(WizardError):
    status_code = 400


class UnsupportedMediaType(WizardError):
    # reported as 400 like every other bad upload
    status_code = 400


class SessionNotFound(WizardError):
    status_code = 404

    def __init__(self, session_id: str):
        super().__init__("Session not found")
        self.session_id = session_id
