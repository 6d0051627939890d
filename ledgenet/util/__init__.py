"""Supporting utilities: buffered logs, a millisecond timer and a service registry."""