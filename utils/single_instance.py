# Copyright (c) 2025, TheSkyC
# SPDX-License-Identifier: Apache-2.0

from PySide6.QtNetwork import QTcpServer, QTcpSocket, QHostAddress
from PySide6.QtCore import QObject, Signal
import logging

logger = logging.getLogger(__name__)

SINGLE_INSTANCE_PORT = 20461
ACTIVATE_MSG = b"ACTIVATE_I18N_STRING_EDITOR"
OPEN_PREFIX = b"OPEN:"


class SingleInstanceServer(QObject):
    request_activation = Signal()
    request_open_file = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.server = QTcpServer(self)
        self.server.newConnection.connect(self._handle_new_connection)

    def start(self):
        if not self.server.listen(QHostAddress.LocalHost, SINGLE_INSTANCE_PORT):
            logger.error(f"SingleInstanceServer failed to listen on port {SINGLE_INSTANCE_PORT}")
            return False
        return True

    def _handle_new_connection(self):
        socket = self.server.nextPendingConnection()
        socket.readyRead.connect(lambda: self._read_data(socket))

    def _read_data(self, socket):
        data = socket.readAll().data()
        if data == ACTIVATE_MSG:
            self.request_activation.emit()
        elif data.startswith(OPEN_PREFIX):
            self.request_activation.emit()
            self.request_open_file.emit(data[len(OPEN_PREFIX):].decode('utf-8', errors='replace'))
        socket.disconnectFromHost()


def raise_existing_instance(file_path=None):
    """Asks a running editor to come to the front (optionally opening a file). Returns True if one answered."""
    socket = QTcpSocket()
    socket.connectToHost(QHostAddress.LocalHost, SINGLE_INSTANCE_PORT)

    if socket.waitForConnected(500):
        message = OPEN_PREFIX + file_path.encode('utf-8') if file_path else ACTIVATE_MSG
        socket.write(message)
        socket.waitForBytesWritten(500)
        socket.disconnectFromHost()
        return True
    return False
