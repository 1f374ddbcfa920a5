from evoting.service.cryptographic_service import CryptographicService, create_service

crypto_service = create_service()


def get_service() -> CryptographicService:
    return crypto_service
