import argparse
import sys
import time
from aes67_sap.config import SAP_MESSAGE_ID_HASH, SAP_REANNOUNCE_PERIOD_SECONDS
from aes67_sap.network import AnnouncerError
from aes67_sap.ui.logging import Logger
from .announce_controller import SAPAnnouncer

logger = Logger()

STARTER_CODENAME = 'STARTER'

server_logger = logger.get_logger(f'[{STARTER_CODENAME}]')


def _hash_value(text: str) -> int:
  value = int(text, 0)
  if not 0 <= value <= 0xFFFF:
    raise argparse.ArgumentTypeError(f"must be between 0 and 0xFFFF: {text}")
  return value


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog="aes67-sap", description="Announce an AES67 audio stream with SAP")
  parser.add_argument("interface", help="Network interface to announce from, e.g. eth0")
  parser.add_argument("-n", "--count", type=int, default=1, help="Number of announcements, 0 to repeat until interrupted")
  parser.add_argument("-i", "--interval", type=float, default=SAP_REANNOUNCE_PERIOD_SECONDS, help="Seconds between announcements")
  parser.add_argument("-s", "--session-name", help="Session name (defaults to the hostname)")
  parser.add_argument("--message-id-hash", type=_hash_value, default=SAP_MESSAGE_ID_HASH, help="SAP message identifier hash, e.g. 0x1234")
  parser.add_argument("--sendonly", action="store_true", help="Advertise a=sendonly instead of a=recvonly")
  parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose mode")
  return parser


def main(argv: list[str] | None = None) -> int:
  parser = build_parser()
  args = parser.parse_args(argv)
  if args.count < 0:
    parser.error("--count cannot be negative")
  if args.interval <= 0:
    parser.error("--interval must be positive")
  direction = "sendonly" if args.sendonly else "recvonly"

  try:
    announcer = SAPAnnouncer(args.interface, args.session_name, args.message_id_hash, direction, args.verbose)
  except AnnouncerError as e:
    server_logger.error(str(e))
    return 1

  if args.count == 0:
    # Errors are logged by the periodic loop
    announcer.start(args.interval)
    try:
      while announcer.running:
        time.sleep(1)
    except KeyboardInterrupt:
      server_logger.info("Stopped")
    finally:
      announcer.stop()
    return 0

  try:
    for sent in range(args.count):
      if sent:
        time.sleep(args.interval)
      announcer.announce()
  except AnnouncerError as e:
    server_logger.error(str(e))
    return 1
  except KeyboardInterrupt:
    server_logger.info("Stopped")
  return 0


if __name__ == "__main__":
  sys.exit(main())
