"""Dispatch – host methods that are deliberately left unmodeled.

Every path here resolves through the ``notImplementedAction`` fallback. Paths
are relative to ``AP``.
"""

NOT_IMPLEMENTED_METHODS: tuple[str, ...] = (
    "context.getContext",
    "cookie.save",
    "cookie.read",
    "cookie.erase",
    "dialog.getButton",
    "dialog.disableCloseOnSubmit",
    "dialog.createButton",
    "dialog.isCloseOnEscape",
    "events.onPublic",
    "events.oncePublic",
    "events.onAny",
    "events.onAnyPublic",
    "events.offPublic",
    "events.offAll",
    "events.offAllPublic",
    "events.offAny",
    "events.offAnyPublic",
    "events.emitPublic",
    "history.back",
    "history.forward",
    "history.go",
    "history.replaceState",
    "host.getSelectedText",
    "resize",
    "sizeToParent",
    "inlineDialog.hide",
    "jira.refreshIssuePage",
    "jira.getWorkflowConfiguration",
    "jira.isDashboardItemEditable",
    "jira.openCreateIssueDialog",
    "jira.setDashboardItemTitle",
    "jira.openDatePicker",
    "jira.initJQLEditor",
    "jira.showJQLEditor",
    "jira.isNativeApp",
    "navigator.getLocation",
    "navigator.go",
    "navigator.reload",
    "user.getCurrentUser",
    "user.getTimeZone",
)

__all__ = ["NOT_IMPLEMENTED_METHODS"]
