"""
PasswordHasher - Service pour le hachage des mots de passe
"""

from passlib.context import CryptContext

DEFAULT_WORK_FACTOR = 12


class PasswordHasher:
    """Service pour le hachage (bcrypt salé) et la vérification des mots de passe"""
    
    def __init__(self, work_factor: int = DEFAULT_WORK_FACTOR):
        self.work_factor = work_factor
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=work_factor
        )
    
    def hash(self, password: str) -> str:
        """Génère un hachage pour un mot de passe"""
        return self.pwd_context.hash(password)
    
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Vérifie un mot de passe non haché contre un mot de passe haché"""
        return self.pwd_context.verify(plain_password, hashed_password)
    
    def dummy_verify(self) -> bool:
        """Simule une vérification (même coût) quand aucun hash n'existe"""
        return self.pwd_context.dummy_verify()
