"""Protocol conformance tests."""

from shiptrack.protocols import ShipmentRepository, UserRepository


class _FullShipmentRepo:
    async def get_by_id(self, shipment_id):
        return None

    async def get_by_tracking_number(self, tracking_number):
        return None

    async def list_all(self, limit=None):
        return []

    async def create(self, **fields):
        raise NotImplementedError

    async def update(self, shipment_id, **fields):
        return None

    async def delete(self, shipment_id):
        return False


class _LookupOnlyRepo:
    """Missing write methods; should NOT satisfy protocol."""

    async def get_by_id(self, shipment_id):
        return None

    async def get_by_tracking_number(self, tracking_number):
        return None


def test_full_repository_satisfies_protocol() -> None:
    assert isinstance(_FullShipmentRepo(), ShipmentRepository)


def test_incomplete_repository_does_not_satisfy_protocol() -> None:
    assert not isinstance(_LookupOnlyRepo(), ShipmentRepository)


def test_shipment_repository_is_not_a_user_repository() -> None:
    assert not isinstance(_FullShipmentRepo(), UserRepository)
