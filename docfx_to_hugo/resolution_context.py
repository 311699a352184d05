"""The state that path and reference resolution read from."""

from dataclasses import dataclass

from docfx_to_hugo.external_authority import DEFAULT_AUTHORITIES, ExternalAuthority
from docfx_to_hugo.item_store import ItemStore
from docfx_to_hugo.uid_disambiguator import UidDisambiguation, disambiguate


@dataclass(frozen=True)
class ResolutionContext:
    """Everything needed to resolve a path or a reference, passed explicitly."""

    store: ItemStore
    disambiguation: UidDisambiguation
    authorities: tuple[ExternalAuthority, ...] = DEFAULT_AUTHORITIES
    api_root: str = "api"


def build_resolution_context(
    store: ItemStore,
    authorities: tuple[ExternalAuthority, ...] = DEFAULT_AUTHORITIES,
    api_root: str = "api",
) -> ResolutionContext:
    """Freeze the store, disambiguate its UIDs and bundle the result."""
    store.freeze()
    return ResolutionContext(
        store=store,
        disambiguation=disambiguate(store),
        authorities=authorities,
        api_root=api_root.strip("/"),
    )
