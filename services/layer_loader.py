# ============================================================================
# LAYER LOADER
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Service - Boundary layer load state machine
# PURPOSE: Resolve layer selections, fetch documents, drop stale results
# CREATED: 19 OCT 2026
# ============================================================================
"""
Layer Loader

State machine per selection change:

    IDLE -> LOADING -> LOADED(doc)
                    -> FAILED(error)

Stale-response suppression:
    There is no fetch cancellation. Each select() bumps a generation counter
    and captures it before awaiting the fetch. When the fetch completes, the
    result is applied only if the captured generation is still current.
    A slow earlier request therefore never overwrites a faster later one -
    completions are ordered by arrival, not by request time.

Failures are never fatal: the state becomes FAILED, document stays None, and
the renderer falls back to plain base imagery. No automatic retry.
"""

from typing import Callable, Dict, Optional

from core.config import LayerDefaults
from core.contracts import LayerType, LoadStatus
from core.errors import BoundaryLoadError
from core.logging import ComponentType, get_logger, log_checkpoint, log_context
from core.models import BoundaryDocument, LayerState
from infrastructure.boundary_source import BoundarySource

logger = get_logger(__name__, ComponentType.CONTROLLER)

LayerListener = Callable[[LayerState], None]


class LayerLoader:
    """Loads the boundary document for the currently selected layer."""

    def __init__(
        self,
        source: BoundarySource,
        config: Optional[LayerDefaults] = None,
        on_change: Optional[LayerListener] = None,
    ):
        """
        Args:
            source: Where boundary documents come from
            config: Layer-to-resource mapping
            on_change: Called with the new LayerState after every transition
                that is applied (never for discarded stale results)
        """
        self.source = source
        self.config = config or LayerDefaults()
        self.on_change = on_change
        self._generation = 0
        self._state = LayerState()
        self._document: Optional[BoundaryDocument] = None

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def state(self) -> LayerState:
        return self._state

    @property
    def document(self) -> Optional[BoundaryDocument]:
        """The loaded document; None while LOADING, FAILED or IDLE."""
        return self._document

    @property
    def generation(self) -> int:
        return self._generation

    def resource_for(self, layer: LayerType) -> str:
        """Each selector choice resolves to its own resource."""
        resources: Dict[LayerType, str] = self.config.resources
        try:
            return resources[LayerType(layer)]
        except (KeyError, ValueError):
            raise ValueError(f"No boundary resource configured for layer '{layer}'") from None

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def _transition(self, state: LayerState, document: Optional[BoundaryDocument]) -> None:
        self._state = state
        self._document = document
        if self.on_change is not None:
            self.on_change(state)

    # =========================================================================
    # SELECTION
    # =========================================================================

    def begin(self, layer: LayerType) -> LayerState:
        """
        Enter LOADING for a new selection.

        Returns:
            The LOADING state. Its generation is the token the eventual
            completion must match.
        """
        layer = LayerType(layer)
        resource = self.resource_for(layer)
        self._generation += 1
        generation = self._generation

        with log_context(layer=layer.value, generation=generation):
            logger.info(f"Loading boundary layer from {resource}")

        loading = LayerState(
            layer=layer,
            status=LoadStatus.LOADING,
            generation=generation,
            resource=resource,
        )
        self._transition(loading, None)
        return loading

    async def select(self, layer: LayerType) -> LayerState:
        """
        Select a layer and load its document.

        Returns the loader state once this request has settled. If a newer
        selection superseded it meanwhile, that newer state is returned and
        this request's result has been discarded.
        """
        loading = self.begin(layer)
        generation, layer, resource = loading.generation, loading.layer, loading.resource

        try:
            document = await self.source.fetch(resource)
        except BoundaryLoadError as e:
            self._fail(generation, layer, resource, str(e))
        except Exception as e:
            logger.exception(f"Unexpected error loading {resource}: {e}")
            self._fail(generation, layer, resource, f"Unexpected error: {e}")
        else:
            self._complete(generation, layer, resource, document)

        return self._state

    def _complete(
        self,
        generation: int,
        layer: LayerType,
        resource: str,
        document: BoundaryDocument,
    ) -> None:
        with log_context(layer=layer.value, generation=generation):
            if not self.is_current(generation):
                logger.debug(
                    f"Discarding stale boundary document (current generation {self._generation})"
                )
                return

            self._transition(
                LayerState(
                    layer=layer,
                    status=LoadStatus.LOADED,
                    generation=generation,
                    resource=resource,
                ),
                document,
            )
            log_checkpoint("layer_loaded", {"resource": resource, "features": len(document)}, logger=logger)

    def _fail(
        self,
        generation: int,
        layer: LayerType,
        resource: str,
        error: str,
    ) -> None:
        with log_context(layer=layer.value, generation=generation):
            if not self.is_current(generation):
                logger.debug(f"Discarding stale boundary failure: {error}")
                return

            logger.warning(f"Boundary layer failed to load, showing base imagery: {error}")
            self._transition(
                LayerState(
                    layer=layer,
                    status=LoadStatus.FAILED,
                    generation=generation,
                    resource=resource,
                    error=error,
                ),
                None,
            )


__all__ = ["LayerLoader", "LayerListener"]
