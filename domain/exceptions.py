"""
Exceptions du domaine - Chaque type correspond à un code HTTP fixe
"""


class MessagelyError(Exception):
    """Erreur de base de l'application"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(MessagelyError):
    """Entrée manquante ou malformée"""
    status_code = 400


class UnauthorizedError(MessagelyError):
    """Identifiants ou token manquants/invalides"""
    status_code = 401


class ForbiddenError(MessagelyError):
    """Authentifié mais non autorisé pour cette ressource"""
    status_code = 403


class NotFoundError(MessagelyError):
    """Entité référencée introuvable"""
    status_code = 404


class ConflictError(MessagelyError):
    """Doublon sur une clé unique"""
    status_code = 409
