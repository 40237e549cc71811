# ===== apps/ipo/encryption.py =====
from cryptography.fernet import Fernet, InvalidToken
from django.conf import settings
import base64
import hashlib
import logging

logger = logging.getLogger(__name__)

class EncryptionService:
    """Encrypts identity numbers (PAN) stored on IPO accounts"""

    def __init__(self, key=None):
        self._key = key
        self._cipher = None

    @property
    def cipher(self):
        # built lazily so settings overrides in tests take effect
        if self._cipher is None:
            key = self._key or settings.FIELD_ENCRYPTION_KEY
            if key:
                self._cipher = Fernet(key)
            else:
                digest = hashlib.sha256(settings.SECRET_KEY.encode()).digest()
                self._cipher = Fernet(base64.urlsafe_b64encode(digest))
        return self._cipher

    def encrypt(self, text: str) -> str:
        """Encrypt text"""
        if not text:
            return ''
        return self.cipher.encrypt(text.encode()).decode()

    def decrypt(self, encrypted_text: str) -> str:
        """Decrypt text"""
        if not encrypted_text:
            return ''
        try:
            return self.cipher.decrypt(encrypted_text.encode()).decode()
        except InvalidToken:
            logger.error("Stored value could not be decrypted with the current key")
            raise

encryption_service = EncryptionService()
