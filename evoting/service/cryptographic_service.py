"""
Cryptographic service: a registry of capabilities that can be listed
and computed by id.

09-05-2023
"""

import logging

from evoting.config import CAPABILITIES_PAGE_SIZE, SERVICE_NAME, SERVICE_VERSION
from evoting.crypto.exceptions import CapabilityError, EVotingError
from evoting.service.capabilities import CAPABILITY_CLASSES, Capability

logger = logging.getLogger(__name__)


class CryptographicService(object):
    name = SERVICE_NAME
    version = SERVICE_VERSION

    def __init__(self) -> None:
        self.capabilities = {}

    def register_capability(self, capability: Capability):
        if capability.id in self.capabilities:
            raise CapabilityError(f'a capability with id "{capability.id}" has already been registered')

        self.capabilities[capability.id] = capability
        logger.info("registered capability %s (%s)", capability.name, capability.id)

    def list_capabilities(self, filter_name=None, filter_id=None, filter_args=None, page_size=None, page_num=None):
        """
        Lists capabilities sorted by id. Filters are combined, pagination
        only applies when a page number is given.
        """
        capabilities = [self.capabilities[k].info() for k in sorted(self.capabilities)]

        capabilities = [
            cap for cap in capabilities
            if (filter_name is None or cap["name"] == filter_name)
            and (filter_id is None or cap["id"] == filter_id)
            and (filter_args is None or cap["num_arguments"] == filter_args)
        ]

        if page_size is None:
            page_size = CAPABILITIES_PAGE_SIZE

        if page_size < 1 or (page_num is not None and page_num < 0):
            raise CapabilityError("page size must be positive and page number non-negative")

        if page_num is not None:
            start = page_num * page_size
            return capabilities[start:start + page_size]

        return capabilities

    def compute(self, request_id: str, capability_id: str, arguments: list) -> dict:
        result = {"request_id": request_id, "ok": False, "result": [], "error": None}

        capability = self.capabilities.get(capability_id)
        try:
            if capability is None:
                raise CapabilityError("requested capability is unsupported")
            result["result"] = capability.compute(arguments)
            result["ok"] = True
        except (EVotingError, ValueError) as e:
            logger.warning("compute %s failed for capability %s: %s", request_id, capability_id, e)
            result["error"] = str(e)

        return result


def create_service(randfunc=None) -> CryptographicService:
    service = CryptographicService()
    for capability_class in CAPABILITY_CLASSES:
        capability = capability_class() if randfunc is None else capability_class(randfunc=randfunc)
        service.register_capability(capability)
    return service
