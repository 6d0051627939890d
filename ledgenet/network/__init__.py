"""UDP networking: addresses, packets, their wire format, a socket, and client and server peers."""