from backlight_ctl.cli import main

raise SystemExit(main())
