import argparse
import logging
import pygame
from config import W, H, FPS_DEFAULT, FRAME_DT_CAP
from controls import InputIntent, handle_event
from game import new_match, restart, step, toggle_pause
from ui import make_fonts, render, restart_button_rect

logger = logging.getLogger(__name__)


def non_negative_int(text):
    try:
        v = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if v < 0:
        raise argparse.ArgumentTypeError("must be 0 or greater")
    return v


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-paddle ball game against a scripted opponent")
    parser.add_argument("--fps", type=non_negative_int, default=FPS_DEFAULT, help=f"Frame cap, 0 = uncapped (default {FPS_DEFAULT})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for serve angles and directions")
    parser.add_argument("--debug", action="store_true", help="Start with the debug overlay shown (F3 toggles)")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default WARNING)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    match = new_match(args.seed)
    intent = InputIntent()

    pygame.init()
    try:
        screen = pygame.display.set_mode((W, H))
        pygame.display.set_caption("Pong")
        clock = pygame.time.Clock()
        fonts = make_fonts()

        restart_btn = restart_button_rect()
        show_debug = args.debug
        hover_restart = False

        running = True
        while running:
            dt = clock.tick(args.fps) / 1000.0
            if dt > FRAME_DT_CAP:
                dt = FRAME_DT_CAP

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False

                elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                    running = False

                elif e.type == pygame.KEYDOWN and e.key == pygame.K_F3:
                    show_debug = not show_debug

                elif e.type == pygame.KEYDOWN and e.key == pygame.K_p:
                    toggle_pause(match)

                elif e.type == pygame.KEYDOWN and e.key == pygame.K_r:
                    restart(match)

                elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    if restart_btn.collidepoint(e.pos):
                        restart(match)

                else:
                    if e.type == pygame.MOUSEMOTION:
                        hover_restart = restart_btn.collidepoint(e.pos)
                    handle_event(intent, e)

            step(match, intent, dt)

            render(screen, fonts, match, clock.get_fps(), show_debug, hover_restart)
            pygame.display.flip()
    except KeyboardInterrupt:
        logger.info("interrupted")
    finally:
        logger.info("quit at %d - %d", *match.scores)
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
