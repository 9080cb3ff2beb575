"""
Unit tests for the apartment document schema.
"""

import json
from uuid import uuid4

import pytest
from pydantic import ValidationError

from property_manager.domain.entities.apartment import Apartment
from property_manager.infrastructure.data.documents import ApartmentDocument


class TestApartmentDocument:
    """Test cases for converting apartments to and from documents."""

    def test_document_shape(self, five_room_apartment, renters):
        five_room_apartment.id = uuid4()
        renters[1].evict()
        five_room_apartment.renters.extend(renters)

        payload = json.loads(ApartmentDocument.from_entity(five_room_apartment).to_json())

        assert payload['id'] == str(five_room_apartment.id)
        assert payload['name'] == 'A1'
        assert payload['rooms'][0] == {'type': 'bedroom', 'length': 10.0, 'width': 10.0}
        assert payload['renters'][1] == {
            'name': 'jim',
            'age': 19,
            'gender': 'm',
            'occupation': 'movie star',
            'cash': 1000.0,
            'is_evicted': True,
        }

    def test_requires_id(self):
        with pytest.raises(ValueError, match="must have an id"):
            ApartmentDocument.from_entity(Apartment.create('a1'))

    def test_to_entity_reproduces_state(self, five_room_apartment, renters):
        five_room_apartment.id = uuid4()
        renters[0].cash = 166.67
        renters[2].evict()
        five_room_apartment.renters.extend(renters)

        raw = ApartmentDocument.from_entity(five_room_apartment).to_json()
        restored = ApartmentDocument.from_json(raw).to_entity()

        assert restored == five_room_apartment
        assert restored is not five_room_apartment
        assert restored.renters[0] is not five_room_apartment.renters[0]

    def test_snapshot_is_detached_from_entity(self, five_room_apartment, renters):
        five_room_apartment.id = uuid4()
        five_room_apartment.renters.extend(renters)
        document = ApartmentDocument.from_entity(five_room_apartment)

        renters[0].cash = 0

        assert document.renters[0].cash == 1000.0

    def test_from_json_accepts_bytes(self):
        apartment_id = uuid4()
        raw = json.dumps({'id': str(apartment_id), 'name': 'a1', 'rooms': [], 'renters': []}).encode()

        apartment = ApartmentDocument.from_json(raw).to_entity()

        assert apartment.id == apartment_id
        assert apartment.rooms == []

    def test_invalid_document_rejected(self):
        raw = json.dumps({'id': 'not-a-uuid', 'name': 'a1'})

        with pytest.raises(ValidationError):
            ApartmentDocument.from_json(raw)

    def test_invalid_stored_values_rejected_by_entity(self):
        raw = json.dumps({
            'id': str(uuid4()),
            'name': 'a1',
            'rooms': [{'type': 'bedroom', 'length': -5, 'width': 10}],
        })

        with pytest.raises(ValueError, match="Length cannot be negative"):
            ApartmentDocument.from_json(raw).to_entity()

    @pytest.mark.parametrize("literal", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_dimensions_rejected(self, literal):
        raw = (
            '{"id": "%s", "name": "a1", "rooms": '
            '[{"type": "bedroom", "length": %s, "width": 10}]}' % (uuid4(), literal)
        )

        with pytest.raises(ValidationError):
            ApartmentDocument.from_json(raw)

    def test_non_finite_cash_rejected(self):
        raw = (
            '{"id": "%s", "name": "a1", "renters": [{"name": "bob", "age": 35, '
            '"cash": Infinity}]}' % uuid4()
        )

        with pytest.raises(ValidationError):
            ApartmentDocument.from_json(raw)
