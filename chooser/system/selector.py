"""Selection of one chooser invocation for the current session."""

import logging

from chooser.errors import NoSuitableExecutable
from chooser.models import Invocation, SelectionContext

logger = logging.getLogger(__name__)


class ChooserSelector:
    """Selects the first invocation matching the terminal/desktop mode."""

    def select(
        self,
        invocations: list[Invocation],
        context: SelectionContext,
    ) -> Invocation:
        """
        Select the invocation to launch.

        Being detached from a terminal always forces desktop mode, whatever
        the caller's force_desktop flag says.

        Raises:
            NoSuitableExecutable: if no invocation has the required class
        """
        wanted = context.chooser_class
        logger.debug(
            f"Selecting {wanted.value} chooser "
            f"(terminal: {context.running_in_terminal}, force_desktop: {context.force_desktop})"
        )

        for invocation in invocations:
            if invocation.chooser_class == wanted:
                logger.info(f"Selected chooser: {invocation.name}")
                return invocation
            logger.debug(f"{invocation.name}: {invocation.chooser_class.value}, skipping")

        raise NoSuitableExecutable(f"No suitable executables found for {wanted.value} mode")
