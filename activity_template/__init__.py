"""
activity-template: The "Custom Activity" new-activity wizard template.

Renders the manifest fragment, Kotlin source file and optional data-binding layout
for a new Android activity from a small set of wizard parameters.
"""

__version__ = "1.0.0"
__author__ = "activity-template Team"
