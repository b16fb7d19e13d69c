from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Tuple
from web3 import Web3

from batch_scanner.utils import hex_to_str


@dataclass(frozen=True)
class EventArgument:
    name: str
    type: str
    indexed: bool = False


def canonical_signature(name: str, arguments: Iterable[EventArgument]) -> str:
    return f"{name}({','.join(arg.type for arg in arguments)})"


@dataclass(frozen=True)
class EventSignature:
    """Static description of a contract event: its name, argument layout and topic hash"""
    name: str
    arguments: Tuple[EventArgument, ...]
    topic_hash: str

    @classmethod
    def from_abi(cls, entry: dict) -> "EventSignature":
        if entry.get("type") != "event":
            raise ValueError(f"ABI entry {entry.get('name')} is not an event")
        arguments = tuple(
            EventArgument(name=arg["name"], type=arg["type"], indexed=arg.get("indexed", False))
            for arg in entry["inputs"]
        )
        return cls(
            name=entry["name"],
            arguments=arguments,
            topic_hash=hex_to_str(Web3.keccak(text=canonical_signature(entry["name"], arguments))),
        )

    @property
    def canonical(self) -> str:
        return canonical_signature(self.name, self.arguments)

    @property
    def indexed_arguments(self) -> Tuple[EventArgument, ...]:
        return tuple(arg for arg in self.arguments if arg.indexed)

    @property
    def non_indexed_arguments(self) -> Tuple[EventArgument, ...]:
        return tuple(arg for arg in self.arguments if not arg.indexed)


class EventRegistry:
    """Read-only lookup of event signatures by topic hash and by name.

    Built once at startup and handed to the scanner and decoder.
    """

    def __init__(self, signatures: Iterable[EventSignature]) -> None:
        signatures = tuple(signatures)
        self._by_topic = MappingProxyType({sig.topic_hash: sig for sig in signatures})
        self._by_name = MappingProxyType({sig.name: sig for sig in signatures})

    @classmethod
    def from_abi(cls, abi: List[dict], names: Optional[Iterable[str]] = None) -> "EventRegistry":
        wanted = set(names) if names is not None else None
        return cls(
            EventSignature.from_abi(entry)
            for entry in abi
            if entry.get("type") == "event" and (wanted is None or entry["name"] in wanted)
        )

    def get(self, name: str) -> EventSignature:
        return self._by_name[name]

    def match(self, topic: str) -> Optional[EventSignature]:
        return self._by_topic.get(topic.lower())

    @property
    def topic_hashes(self) -> List[str]:
        return list(self._by_topic)

    def __iter__(self) -> Iterator[EventSignature]:
        return iter(self._by_topic.values())

    def __len__(self) -> int:
        return len(self._by_topic)
