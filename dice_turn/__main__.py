from dice_turn.demo import main

raise SystemExit(main())
