"""The pygame game client: drawing, the client main loop and its command."""