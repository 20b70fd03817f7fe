from exactsqrt.cli import main

raise SystemExit(main())
