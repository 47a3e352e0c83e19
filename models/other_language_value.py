# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0


class OtherLanguageValue:
    def __init__(self, language_file, value=None, failed=False):
        self.language_file = language_file
        self.value = value
        self.failed = failed

    def __repr__(self):
        return f"OtherLanguageValue({self.language_file!r}, {self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, OtherLanguageValue):
            return NotImplemented
        return (self.language_file, self.value, self.failed) == (other.language_file, other.value, other.failed)
