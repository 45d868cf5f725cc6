"""
Template rendering for generated artifacts.

Every artifact is rendered from an inline Jinja2 template held in a single
environment. Undefined variables fail fast, and identifiers are inserted verbatim
(no autoescaping), since the wizard guarantees they are legal.
"""

from __future__ import annotations

from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateError

from .core.exceptions import RenderError
MANIFEST_TEMPLATE = "AndroidManifest.xml"
COMPOSE_ACTIVITY_TEMPLATE = "ComposeActivity.kt"
BINDING_ACTIVITY_TEMPLATE = "BindingActivity.kt"
LAYOUT_TEMPLATE = "activity_layout.xml"

TEMPLATES: dict[str, str] = {
    MANIFEST_TEMPLATE: '''\
<manifest xmlns:android="http://schemas.android.com/apk/res/android"
    xmlns:tools="http://schemas.android.com/tools">

    <application>

        <activity
            android:name="{{ activity_class }}"
{% if is_launcher %}
            android:exported="{{ exported }}">
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>
        </activity>
{% else %}
            android:exported="{{ exported }}" />
{% endif %}

    </application>

</manifest>
''',
    COMPOSE_ACTIVITY_TEMPLATE: '''\
package {{ package }}

import android.os.Bundle
import androidx.activity.compose.setContent
import androidx.compose.foundation.layout.fillMaxSize
import androidx.compose.material3.MaterialTheme
import androidx.compose.material3.Scaffold
import androidx.compose.ui.Modifier
import androidx.compose.ui.res.colorResource
import {{ app_package }}.{{ base_activity }}
import {{ app_package }}.R
import dagger.hilt.android.AndroidEntryPoint

/**
 * Created by {{ author }} on {{ date }}.
 */
@AndroidEntryPoint
class {{ activity_name }} : {{ base_activity }}() {

    override fun onCreate(savedInstanceState: Bundle?) {
        super.onCreate(savedInstanceState)

        setContent {
            MaterialTheme {
                Scaffold(
                    modifier = Modifier.fillMaxSize(),
                    topBar = {
                        // unused remove
                    },
                    bottomBar = {
                        // unused remove
                    },
                    containerColor = colorResource(id = R.color.{{ container_color }})
                ) { contentPadding ->
                    TODO("Not yet implemented")
                }
            }
        }
    }
}
''',
    BINDING_ACTIVITY_TEMPLATE: '''\
package {{ package }}

import android.os.Bundle
import {{ app_package }}.{{ base_activity }}
import {{ app_package }}.R
import {{ app_package }}.databinding.{{ binding_class }}
import dagger.hilt.android.AndroidEntryPoint

/**
 * Created by {{ author }} on {{ date }}.
 */
@AndroidEntryPoint
class {{ activity_name }} : {{ base_activity }}() {

    private val binding by binding<{{ binding_class }}>(R.layout.{{ layout_name }})

    override fun onCreate(savedInstanceState: Bundle?) {
        super.onCreate(savedInstanceState)

        binding.apply {
            TODO("Not yet implemented")
        }
    }
}
''',
    LAYOUT_TEMPLATE: '''\
<?xml version="1.0" encoding="utf-8"?>
<layout xmlns:android="http://schemas.android.com/apk/res/android"
    xmlns:app="http://schemas.android.com/apk/res-auto"
    xmlns:tools="http://schemas.android.com/tools">

    <data>

        <variable name="activity" type="{{ activity_class }}" />

    </data>

    <androidx.constraintlayout.widget.ConstraintLayout
        android:layout_width="match_parent"
        android:layout_height="match_parent"
        android:background="{{ background }}"
        tools:context="{{ activity_class }}">

    </androidx.constraintlayout.widget.ConstraintLayout>

</layout>
''',
}

environment = Environment(
    loader=DictLoader(TEMPLATES),
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(name: str, **context: Any) -> str:
    """Render one of the bundled templates.

    Args:
        name: Template name, one of the keys of ``TEMPLATES``
        **context: Template variables

    Returns:
        Rendered text

    Raises:
        RenderError: If the template is unknown or references an unset variable.
    """
    try:
        text = environment.get_template(name).render(**context)
    except TemplateError as e:
        raise RenderError(
            message="template rendering failed",
            context={"variables": sorted(context)},
            cause=e,
            template_name=name,
        ) from e

    return text
