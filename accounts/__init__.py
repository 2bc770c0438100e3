"""Account sign-up/sign-in and user/project membership service."""
