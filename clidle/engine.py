from __future__ import annotations

import logging
import math

from clidle.catalog import Catalog
from clidle.command import Command, CommandKind, parse_order
from clidle.errors import SellNotImplementedError, TransactionError, UnknownItemError
from clidle.item import HoldingStatus, ItemDef
from clidle.state import EngineSnapshot, EngineState, InputMode, NormalMode, PromptMode

logger = logging.getLogger(__name__)


class EconomyEngine:
    """Authoritative game logic processor."""

    def __init__(self, catalog: Catalog) -> None:
        errors = catalog.validate()
        if errors:
            raise ValueError(
                "Invalid Catalog:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.catalog = catalog
        self.state = EngineState()

    # ── Core loop ────────────────────────────────────────────────────

    def tick(self) -> float:
        """Apply one tick interval of production. Returns the amount added."""
        earned = self.production_per_tick()
        self.state.balance += earned
        logger.debug("Tick produced %.2f, balance now %.2f", earned, self.state.balance)
        return earned

    def production_per_tick(self) -> float:
        """Sum of production over the current holdings, without applying it."""
        total = 0.0
        for item_id, count in list(self.state.holdings.items()):
            if count <= 0:
                continue
            total += self.catalog.lookup_by_id(item_id).production(count)
        return total

    # ── Player actions ───────────────────────────────────────────────

    def add_resource_unit(self) -> None:
        """Write one line of code by hand."""
        self.state.balance += 1

    def buy(self, item_name: str, quantity: int = 1) -> bool:
        """Attempt to buy *quantity* units of an item by short name.

        Returns True when the purchase went through and False when the
        balance was insufficient, in which case nothing changes. Raises
        UnknownItemError when no item has that short name.
        """
        if quantity < 1:
            raise ValueError(f"Quantity must be at least 1, got {quantity}")

        item = self._resolve(item_name)
        total_cost = item.cost * quantity

        # Strict comparison against the floored balance
        if not total_cost < math.floor(self.state.balance):
            logger.debug(
                "Cannot afford %d x %s (cost %d, balance %.2f)",
                quantity, item.short_name, total_cost, self.state.balance,
            )
            return False

        self.state.balance -= total_cost
        self.state.holdings[item.id] = self.state.holdings.get(item.id, 0) + quantity
        logger.debug(
            "Bought %d x %s for %d, balance now %.2f",
            quantity, item.short_name, total_cost, self.state.balance,
        )
        return True

    def sell(self, item_name: str, quantity: int = 1) -> bool:
        """Selling has no economics defined yet.

        The name is still resolved so unknown items report the same error as
        buying. Always raises a TransactionError.
        """
        if quantity < 1:
            raise ValueError(f"Quantity must be at least 1, got {quantity}")
        item = self._resolve(item_name)
        raise SellNotImplementedError(item.short_name)

    # ── Commands ─────────────────────────────────────────────────────

    def apply_command(self, command: Command) -> None:
        """Interpret *command* according to the current input mode."""
        state = self.state
        if state.halted:
            return

        mode = state.mode
        kind = command.kind

        if isinstance(mode, NormalMode):
            if kind is CommandKind.ENTER_BUY_MODE:
                self._enter_prompt(InputMode.BUYING)
            elif kind is CommandKind.ENTER_SELL_MODE:
                self._enter_prompt(InputMode.SELLING)
            elif kind is CommandKind.ADD_RESOURCE_UNIT:
                self.add_resource_unit()
            elif kind is CommandKind.QUIT:
                logger.debug("Quit requested")
                state.halted = True
            return

        if kind is CommandKind.APPEND_CHAR:
            mode.buffer += command.char
        elif kind is CommandKind.DELETE_CHAR:
            mode.buffer = mode.buffer[:-1]
        elif kind is CommandKind.CANCEL:
            logger.debug("Leaving %s mode, discarding %r", mode.kind.name, mode.buffer)
            state.mode = NormalMode()
        elif kind is CommandKind.SUBMIT:
            self._submit(mode)

    # ── Queries ──────────────────────────────────────────────────────

    def get_state(self) -> EngineState:
        """Return live reference to engine state."""
        return self.state

    def holding_statuses(self) -> list[HoldingStatus]:
        """Owned items in catalog order."""
        result: list[HoldingStatus] = []
        for item in self.catalog:
            count = self.state.item_count(item.id)
            if count <= 0:
                continue
            result.append(
                HoldingStatus(
                    item_id=item.id,
                    short_name=item.short_name,
                    display_name=item.display_name,
                    count=count,
                    production=item.production(count),
                )
            )
        return result

    def snapshot(self) -> EngineSnapshot:
        state = self.state
        return EngineSnapshot(
            balance=state.balance,
            holdings=tuple(self.holding_statuses()),
            input_mode=state.input_mode,
            pending_input=state.pending_input,
            last_error=state.last_error,
            production_per_tick=self.production_per_tick(),
            halted=state.halted,
        )

    # ── Private helpers ──────────────────────────────────────────────

    def _resolve(self, item_name: str) -> ItemDef:
        item = self.catalog.lookup_by_name(item_name)
        if item is None:
            raise UnknownItemError(item_name)
        return item

    def _enter_prompt(self, kind: InputMode) -> None:
        logger.debug("Entering %s mode", kind.name)
        self.state.mode = PromptMode(kind)

    def _submit(self, mode: PromptMode) -> None:
        """Run the typed order, then return to normal mode with no buffer."""
        name, quantity = parse_order(mode.buffer)
        self.state.mode = NormalMode()
        try:
            if mode.kind is InputMode.BUYING:
                self.buy(name, quantity)
            else:
                self.sell(name, quantity)
        except TransactionError as e:
            logger.warning("%s", e)
            self.state.last_error = e
