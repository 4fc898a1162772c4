"""Topic module -- loading, cleaning and serializing topic markup."""

from wikigen.topic.loader import load_topic, parse_topic, serialize_topic
from wikigen.topic.transformer import transform_topic

__all__ = ["load_topic", "parse_topic", "serialize_topic", "transform_topic"]
