"""OutlookMailTool — mailbox tools that answer without a mail backend.

Reading real mail needs Microsoft Graph credentials, which this server does
not manage. Until a backend is configured the operations return an empty
mailbox and an explanatory placeholder message.
"""

from __future__ import annotations

import logging
from typing import Any

from restify.tools.models import ParameterDescriptor, SemanticType, ToolDescriptor, ToolOperation

logger = logging.getLogger(__name__)

GRAPH_NOT_CONFIGURED = "Outlook mail functionality requires Microsoft Graph API configuration"


class OutlookMailTool:
    """Exposes ``readOutlookEmails`` and ``readOutlookEmailById``."""

    def operations(self) -> list[ToolOperation]:
        return [
            ToolOperation(
                descriptor=ToolDescriptor(
                    name="readOutlookEmails",
                    description=(
                        "Read emails from Outlook mailbox. "
                        "Can retrieve a list of emails with optional filtering."
                    ),
                    parameters=(
                        ParameterDescriptor(
                            name="maxResults",
                            semantic_type=SemanticType.INTEGER,
                            description="Maximum number of emails to retrieve (default: 10)",
                        ),
                        ParameterDescriptor(
                            name="folderId",
                            semantic_type=SemanticType.STRING,
                            description="Mail folder ID (default: 'inbox')",
                        ),
                    ),
                ),
                handler=self.read_emails,
            ),
            ToolOperation(
                descriptor=ToolDescriptor(
                    name="readOutlookEmailById",
                    description="Read a specific email from Outlook by its message ID.",
                    parameters=(
                        ParameterDescriptor(
                            name="messageId",
                            semantic_type=SemanticType.STRING,
                            description="The ID of the message to retrieve",
                        ),
                    ),
                ),
                handler=self.read_email_by_id,
            ),
        ]

    def read_emails(self, max_results: int, folder_id: str | None) -> list[dict[str, Any]]:
        logger.debug("Reading Outlook emails - maxResults: %s, folderId: %s", max_results, folder_id or "inbox")
        return []

    def read_email_by_id(self, message_id: str | None) -> dict[str, Any]:
        logger.debug("Reading Outlook email by ID: %s", message_id)
        return {"message": GRAPH_NOT_CONFIGURED, "messageId": message_id}
