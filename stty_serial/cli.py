#!/usr/bin/env python3

"""CLI tool to configure a serial port and exchange bytes with it"""

import argparse
import codecs
import logging
import sys

import ok_logging_setup
import stty_serial

ok_logging_setup.skip_traceback_for(stty_serial.SerialPlatformUnsupported)
ok_logging_setup.skip_traceback_for(stty_serial.SerialDeviceException)
ok_logging_setup.skip_traceback_for(stty_serial.SerialConfigException)
ok_logging_setup.skip_traceback_for(stty_serial.SerialOpenException)


def main():
    parser = argparse.ArgumentParser(description="Set up and talk to a tty.")
    parser.add_argument("device", help="Device path, eg. /dev/ttyS0")
    parser.add_argument("--baud", "-b", type=int, help="Baud rate")
    parser.add_argument(
        "--parity",
        "-p",
        choices=sorted(stty_serial.PARITY_ARGS),
        help="Parity checking",
    )
    parser.add_argument(
        "--char-length", "-c", type=int, help="Bits per character (5-8)"
    )
    parser.add_argument(
        "--stop-bits", "-s", type=int, help="Stop bits (1 or 2)"
    )
    parser.add_argument(
        "--flow",
        "-f",
        choices=sorted(stty_serial.FLOW_CONTROL_ARGS),
        help="Flow control mode",
    )
    parser.add_argument(
        "--timeout",
        "-t",
        type=int,
        help="Seconds to wait for the device on each read/write",
    )
    parser.add_argument(
        "--send", help=r"Text to write (escapes like \r\n are decoded)"
    )
    parser.add_argument(
        "--wait",
        "-w",
        type=float,
        default=0.1,
        help="Seconds to pause after writing",
    )
    parser.add_argument(
        "--read",
        "-r",
        type=int,
        metavar="COUNT",
        help="Read up to COUNT bytes (0 for all available)",
    )

    args = parser.parse_args()
    ok_logging_setup.install({"OK_LOGGING_LEVEL": "info"})

    opts = stty_serial.SerialOptions(
        timeout=args.timeout,
        baud_rate=args.baud,
        parity=args.parity,
        character_length=args.char_length,
        stop_bits=args.stop_bits,
        flow_mode=args.flow,
    )

    with stty_serial.SerialPort(args.device, opts) as port:
        logging.info("🔌 Configured %s", args.device)
        if args.send is None and args.read is None:
            return

        port.open()
        if args.send is not None:
            data = codecs.decode(args.send, "unicode-escape").encode("latin-1")
            written = port.write(data, wait_for_reply=args.wait)
            logging.info("➡️ Wrote %d bytes", written)

        if args.read is not None:
            received = port.read(args.read)
            logging.info("⬅️ Read %d bytes", len(received))
            sys.stdout.buffer.write(received)
            sys.stdout.buffer.flush()


if __name__ == "__main__":
    main()
