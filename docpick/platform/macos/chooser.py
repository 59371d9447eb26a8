"""macOS file chooser adapter built on NSOpenPanel."""

from __future__ import annotations

import logging

from docpick.platform.base import ChooserUnavailableError

try:
    import objc
    from AppKit import (
        NSApplication,
        NSModalResponseOK,
        NSOpenPanel,
        NSPopUpButton,
    )
    from Foundation import NSMakeRect, NSObject, NSURL

    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False

LOG = logging.getLogger("docpick")

ALL_FILES_TITLE = "All Files"


if HAS_APPKIT:

    class FilterSwitcher(NSObject):
        """Popup target that toggles the panel between the text filter and all files."""

        def initWithPanel_extensions_(self, panel, extensions):
            self = objc.super(FilterSwitcher, self).init()
            if self is None:
                return None
            self._panel = panel
            self._extensions = list(extensions)
            return self

        def filterChanged_(self, sender):
            if sender.indexOfSelectedItem() == 0:
                self._panel.setAllowedFileTypes_(self._extensions)
            else:
                self._panel.setAllowedFileTypes_(None)


class MacOSFileChooser:
    """Runs a modal NSOpenPanel. Must be called on the main thread."""

    def choose_file(self, title, filter_name, extensions, initial_dir=None):
        if not HAS_APPKIT:
            raise ChooserUnavailableError("AppKit is not available (install pyobjc-framework-Cocoa)")

        NSApplication.sharedApplication().activateIgnoringOtherApps_(True)

        panel = NSOpenPanel.openPanel()
        panel.setTitle_(title)
        panel.setMessage_(title)
        panel.setCanChooseFiles_(True)
        panel.setCanChooseDirectories_(False)
        panel.setAllowsMultipleSelection_(False)
        panel.setAllowedFileTypes_(list(extensions))
        if initial_dir:
            panel.setDirectoryURL_(NSURL.fileURLWithPath_(initial_dir))

        switcher = FilterSwitcher.alloc().initWithPanel_extensions_(panel, extensions)
        popup = NSPopUpButton.alloc().initWithFrame_pullsDown_(NSMakeRect(0, 0, 280, 26), False)
        popup.addItemsWithTitles_([filter_name, ALL_FILES_TITLE])
        popup.setTarget_(switcher)
        popup.setAction_("filterChanged:")
        panel.setAccessoryView_(popup)
        panel.setAccessoryViewDisclosed_(True)

        if panel.runModal() != NSModalResponseOK:
            return None

        urls = panel.URLs()
        if not urls:
            return None
        path = str(urls[0].path())
        LOG.debug(f"NSOpenPanel selected {path}")
        return path
