"""Multi-sentence AIS payload reassembly.

AIS messages longer than one sentence are split into fragments, each a
separate !AIVDM / !AIVDO sentence:

    !AIVDM,2,1,1,A,55?MbV02;H;s<HtKR20EHE:0@T4@Dn2222222216L961O5Gf0NSQEp6ClRp8,0*1C
    !AIVDM,2,2,1,A,88888888880,2*25
           | | | | |           |
           | | | | |           +-- fill bits (only meaningful in the last fragment)
           | | | | +-- payload chunk
           | | | +-- radio channel (A/B)
           | | +-- sequential message id (may be empty)
           | +-- fragment index, 1-based
           +-- fragment count

Deciding whether two fragments belong together is a pairwise test
(``is_continuation``). Adjacent fragments only need to share the channel or
the message id; when a fragment in between was lost, both must match, which
keeps interleaved streams from being joined.

Buffering policy (how long to wait for a missing fragment) belongs to the
caller. ``FragmentQueue`` is the minimal in-memory policy: restart on a first
fragment, drop on a gap, emit on the last fragment.
"""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Fragment:
    """One physical sentence of a possibly multi-part AIS message.

    Attributes:
        fragment_count: Total number of fragments in the message.
        fragment_index: Position of this fragment, starting at 1.
        message_id: Sequential message id; empty for single-part messages.
        channel: Radio channel tag ("A", "B", "1", "2"); may be empty.
        payload: Six-bit armoured payload chunk.
        fill_bits: Number of padding bits at the end of the payload.
    """

    fragment_count: int
    fragment_index: int
    message_id: str
    channel: str
    payload: str
    fill_bits: int = 0

    @property
    def is_fragmented(self) -> bool:
        return self.fragment_count > 1

    @property
    def is_first(self) -> bool:
        return self.fragment_index == 1

    @property
    def is_last(self) -> bool:
        return self.fragment_index == self.fragment_count


def is_continuation(earlier: Fragment, candidate: Fragment) -> bool:
    """Tell whether ``candidate`` continues the message ``earlier`` belongs to.

    Args:
        earlier: A fragment already received.
        candidate: A later fragment to classify.

    Returns:
        True if both fragments have the same count, ``candidate`` comes
        after ``earlier`` and:
        - for adjacent indices, channel or message id match
        - otherwise, channel and message id both match

    Example:
        >>> a = Fragment(3, 1, "5", "A", "")
        >>> is_continuation(a, Fragment(3, 2, "9", "A", ""))
        True
        >>> is_continuation(a, Fragment(3, 3, "5", "B", ""))
        False
    """
    if earlier.fragment_count != candidate.fragment_count:
        return False
    if earlier.fragment_index >= candidate.fragment_index:
        return False

    same_channel = earlier.channel == candidate.channel
    same_message = earlier.message_id == candidate.message_id

    if candidate.fragment_index == earlier.fragment_index + 1:
        return same_channel or same_message
    return same_channel and same_message


def join_payload(fragments: Sequence[Fragment]) -> tuple[str, int]:
    """Concatenate the payload of a complete, ordered fragment sequence.

    Returns:
        A tuple of (payload, fill_bits); the fill bits come from the last
        fragment.

    Raises:
        ValueError: If the sequence is empty, does not start with the first
            fragment, does not end with the last one, or contains a pair
            that is not a continuation.
    """
    if not fragments:
        raise ValueError("No fragments to join")

    first, last = fragments[0], fragments[-1]
    if not first.is_first or not last.is_last:
        raise ValueError("Fragment sequence is incomplete")
    if len(fragments) != first.fragment_count:
        raise ValueError(
            f"Expected {first.fragment_count} fragments, got {len(fragments)}"
        )

    for earlier, candidate in zip(fragments, fragments[1:]):
        if not is_continuation(earlier, candidate):
            raise ValueError(
                f"Fragment {candidate.fragment_index} does not continue "
                f"fragment {earlier.fragment_index}"
            )

    return "".join(fragment.payload for fragment in fragments), last.fill_bits


class FragmentQueue:
    """Collect fragments of one message at a time.

    Example:
        >>> queue = FragmentQueue()
        >>> queue.add(Fragment(2, 1, "1", "A", "55?M"))
        >>> queue.add(Fragment(2, 2, "1", "A", "8888", 2))
        ('55?M8888', 2)
    """

    def __init__(self) -> None:
        self._pending: list[Fragment] = []

    def __len__(self) -> int:
        return len(self._pending)

    def clear(self) -> None:
        self._pending.clear()

    def add(self, fragment: Fragment) -> tuple[str, int] | None:
        """Add a fragment; return the joined payload once it is complete.

        A first fragment discards anything pending. A fragment that does not
        continue the pending ones discards them and is itself dropped.
        """
        if fragment.is_first:
            self._pending.clear()
        elif not self._pending or not is_continuation(self._pending[-1], fragment):
            self._pending.clear()
            return None

        self._pending.append(fragment)
        if not fragment.is_last:
            return None

        fragments, self._pending = self._pending, []
        # a lost middle fragment leaves the chain short
        if len(fragments) != fragment.fragment_count:
            return None
        return join_payload(fragments)
