"""
Serialization for e-voting objects.

Every object exposes the same pair of class methods: ``serialize`` turns an
instance into a JSON string (or into plain JSON data with ``to_dict=True``)
and ``deserialize`` rebuilds it through the strict constructors of the
value types, so anything coming off the wire is validated on the way in.

01-04-2023
"""

from __future__ import annotations
import json

from evoting.crypto.exceptions import MalformedEncoding


def load_json(json_data, type_name: str):
    """
    Parses a JSON document given as str or bytes.
    """
    if isinstance(json_data, (bytes, bytearray)):
        try:
            json_data = bytes(json_data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedEncoding(type_name, "document is not valid utf-8") from e

    if not isinstance(json_data, str):
        raise MalformedEncoding(type_name, f"expected a JSON document, got {type(json_data).__name__}")

    try:
        return json.loads(json_data)
    except json.JSONDecodeError as e:
        raise MalformedEncoding(type_name, f"invalid JSON: {e.msg}") from e


class SerializableObject(object):
    """
    This class is an abstraction layer for serialization
    and deserialization of an object.

    Composite objects list their attributes in ``json_fields``, a mapping
    from attribute name to the class that (de)serializes it. Leaf values
    override ``to_json`` and ``from_json``.
    """

    json_fields = {}

    def to_json(self):
        return {
            name: field_class.serialize(getattr(self, name), to_dict=True)
            for name, field_class in self.json_fields.items()
        }

    @classmethod
    def from_json(cls, data):
        if not isinstance(data, dict):
            raise MalformedEncoding(cls.__name__, "expected a JSON object")

        if set(data.keys()) != set(cls.json_fields.keys()):
            raise MalformedEncoding(
                cls.__name__, f"expected fields {sorted(cls.json_fields)}, got {sorted(data)}"
            )

        kwargs = {
            name: field_class.deserialize(data[name], from_dict=True)
            for name, field_class in cls.json_fields.items()
        }
        return cls(**kwargs)

    @classmethod
    def serialize(cls, obj: SerializableObject, to_dict=False):
        """
        Serializes an object to a JSON like string.
        """
        data = obj.to_json()
        return data if to_dict else json.dumps(data)

    @classmethod
    def deserialize(cls, json_data, from_dict=False) -> SerializableObject:
        """
        Deserializes a JSON like string to a specific
        class instance.
        """
        data = json_data if from_dict else load_json(json_data, cls.__name__)
        return cls.from_json(data)


class SerializableList(object):
    """
    This class is an abstraction layer for serialization
    and deserialization of list of SerializableObjects.
    """

    item_class = SerializableObject

    def __init__(self, *instances) -> None:
        self.instances = list(instances)

    def __iter__(self):
        return iter(self.instances)

    def __len__(self):
        return len(self.instances)

    def __getitem__(self, index):
        return self.instances[index]

    @classmethod
    def serialize(cls, s_list: SerializableList, to_dict=False):
        serialized_instances = [cls.item_class.serialize(obj, to_dict=True) for obj in s_list.instances]
        return serialized_instances if to_dict else json.dumps(serialized_instances)

    @classmethod
    def deserialize(cls, json_data, from_dict=False) -> SerializableList:
        data = json_data if from_dict else load_json(json_data, cls.__name__)
        if not isinstance(data, list):
            raise MalformedEncoding(cls.__name__, "expected a JSON array")
        return cls(*[cls.item_class.deserialize(item, from_dict=True) for item in data])
