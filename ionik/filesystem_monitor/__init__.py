"""Callback sets for filesystem change notifications."""