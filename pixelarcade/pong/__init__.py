"""The Pong lobby: network protocol, lobby server and menu screens."""