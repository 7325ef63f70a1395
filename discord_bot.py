import logging

import discord

from community_site import CommunityClient, STATUSES, ViewState
from community_site.config import configure_logging, load_settings
from community_site.render import render_events, render_news, render_team

# Settings come from the environment / .env file.
# The bot token must be stored as DISCORD_BOT_TOKEN="YOUR_BOT_TOKEN".
settings = load_settings()
configure_logging(settings.log_level)
logger = logging.getLogger("community_site.discord_bot")

# Intents needed to read command messages
intents = discord.Intents.default()
intents.message_content = True

client = discord.Client(intents=intents)
site = CommunityClient.from_settings(settings)


@client.event
async def on_ready():
    """Called once the bot has logged in."""
    logger.info("Logged in as %s", client.user)


async def _send_events(channel, arg: str) -> None:
    status = arg or STATUSES[0]
    if status not in STATUSES:
        await channel.send(f"Unknown tab {status!r}. Use one of: {', '.join(STATUSES)}.")
        return
    view = await site.events()
    view.navigate(STATUSES.index(status) - view.active_index)
    await channel.send(render_events(view.snapshot()))


async def _send_collection(channel, kind: str) -> None:
    view = await (site.news() if kind == "news" else site.team())
    if view.state is ViewState.FAILED:
        await channel.send(f"⚠️ {view.error}")
        return
    if kind == "news":
        # newest first
        await channel.send(render_news(reversed(view.records)))
    else:
        await channel.send(render_team(view.records))


@client.event
async def on_message(message):
    """Called for every message the bot can see."""
    # Ignore the bot's own messages.
    if message.author == client.user:
        return

    command, _, arg = message.content.strip().partition(" ")
    arg = arg.strip().lower()

    try:
        if command == "!events":
            await _send_events(message.channel, arg)
        elif command == "!news":
            await _send_collection(message.channel, "news")
        elif command == "!team":
            await _send_collection(message.channel, "team")
    except discord.DiscordException:
        logger.exception("Failed to answer %r", command)


def main() -> None:
    if not settings.discord_token:
        raise ValueError("DISCORD_BOT_TOKEN is not set. Check your .env file.")
    client.run(settings.discord_token, log_handler=None)


if __name__ == "__main__":
    main()
