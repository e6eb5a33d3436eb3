"""Shared test fixtures."""

from __future__ import annotations

import pytest


ICON_XML = '''<?xml version="1.0" encoding="utf-8"?>
<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:width="24dp"
    android:height="24dp"
    android:viewportWidth="24"
    android:viewportHeight="24">
    <path
        android:fillColor="#FF000000"
        android:pathData="M12 2L2 22" />
</vector>
'''

GROUPED_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="48" android:viewportHeight="32">
    <group android:name="body">
        <path android:fillColor="#FF112233" android:pathData="M0 0h10v10h-10z" android:fillType="evenOdd"/>
        <path android:fillColor="#445566" android:pathData="M20 0h10v10h-10z"/>
    </group>
</vector>
'''

MIXED_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="100.25" android:viewportHeight="50">
    <group>
        <path android:fillColor="red" android:pathData="M3 3h1v1z"/>
        <group>
            <path android:fillColor="blue" android:pathData="M9 9h1v1z"/>
        </group>
    </group>
    <path android:fillColor="#FF00FF00" android:pathData="M1 1h1v1z"/>
    <path android:fillColor="#FF0000FF" android:pathData="M2 2h1v1z"/>
    <group>
        <path android:fillColor="#80FFFFFF" android:pathData="M4 4h1v1z"/>
    </group>
</vector>
'''

# Fills the whole viewport in opaque red.
RED_SQUARE_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="24" android:viewportHeight="24">
    <path android:fillColor="#FFFF0000" android:pathData="M0 0H24V24H0Z"/>
</vector>
'''

# Left half blue, inside a group.
WIDE_XML = '''<vector xmlns:android="http://schemas.android.com/apk/res/android"
    android:viewportWidth="40" android:viewportHeight="20">
    <group>
        <path android:fillColor="#FF0000FF" android:pathData="M0 0H20V20H0Z"/>
    </group>
</vector>
'''


@pytest.fixture
def write_xml(tmp_path):
    """Write an XML document into the temporary directory and return its path."""

    def _write(content: str, name: str = "icon.xml") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
