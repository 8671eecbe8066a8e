"""
Logging utilities for tracking visitor activity across the site.
"""
import logging

from flask import has_request_context, request

logger = logging.getLogger("app.activity")


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.

    Args:
        project_name (str): The project identifier (e.g., 'calculator')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name

    if has_request_context() and request.remote_addr:
        visitor_desc = f"Visitor {request.remote_addr}"
    else:
        visitor_desc = "Anonymous visitor"

    logger.info(f"[{project_name}] Visit: {visitor_desc} visited {display_name}")
